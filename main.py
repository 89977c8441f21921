"""
Terminal entry point
 - Single responsibility: Launch the interactive device menu
 - Imports and calls roku_mvp.main()
"""
import sys
from roku_mvp import main

if __name__ == "__main__":
    sys.exit(main())
