"""
Punto de entrada: python -m dsctool

Delega a la misma app que dscplane.cli.app.
"""
from dscplane.cli.app import app

if __name__ == "__main__":
    app()
