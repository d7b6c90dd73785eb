"""GrappleFlow: a BJJ training journal with a Lab Notebook and an AI coach."""

__version__ = "0.1.0"
