"""Run with: python -m spinningdonut"""
import sys

from spinningdonut.app.main import main

if __name__ == "__main__":
    sys.exit(main())
