"""AITK - link AI toolkit agents and skills into an assistant's discovery directory."""
