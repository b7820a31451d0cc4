"""Application layer: commands, validators, handlers and the CQRS dispatcher."""
