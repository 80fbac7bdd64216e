"""
Entry point for running check-doc as a module.
Usage: python -m checkdoc [--path DIR]
"""
from .cli import app

if __name__ == "__main__":
    app()
