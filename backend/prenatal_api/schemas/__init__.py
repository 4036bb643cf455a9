"""Schemas — Pydantic response models shared by both endpoints."""
