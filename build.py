#!/usr/bin/env python3
from htmlpress.cli import main

if __name__ == "__main__":
    main()
