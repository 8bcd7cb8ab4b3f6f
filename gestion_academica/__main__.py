import sys

from gestion_academica.main import main

if __name__ == "__main__":
    sys.exit(main())
