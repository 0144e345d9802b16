"""
Main entry point for the aiseg2 package.

Allows running the client as: python -m aiseg2
"""

from aiseg2.cli import main

if __name__ == "__main__":
    main()
