"""
Entry point for python -m secday
"""

from secday.web.app import main

if __name__ == "__main__":
    main()
