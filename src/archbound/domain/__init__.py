"""Domain layer: immutable model, boundary view, graph algorithms, ports."""
