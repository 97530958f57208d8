"""Run with: python -m tripboard"""
from tripboard.main import main

if __name__ == "__main__":
    main()
