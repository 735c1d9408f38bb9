"""
Smokefield - Main Entry Point
Ambient smoke hero with a real-time loan calculator
"""

import os
os.environ['SDL_VIDEO_CENTERED'] = '1'

from smokefield.core.app import main


if __name__ == "__main__":
    main()
