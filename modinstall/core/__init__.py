"""Core — domain models, collaborator contracts, configuration, observability."""
