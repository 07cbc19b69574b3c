"""Configuration layer — pydantic section models, settings, logging."""
