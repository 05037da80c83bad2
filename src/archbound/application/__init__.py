"""Application layer: validators, checker facade, reporters."""
