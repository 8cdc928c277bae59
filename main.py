# main.py
import sys

from ride_fares.app.demo import main

if __name__ == "__main__":
    sys.exit(main())
