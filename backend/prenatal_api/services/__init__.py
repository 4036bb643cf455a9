"""Services Layer — orchestrates core logic with the external LLM call."""
