# portalcraft/__main__.py
from portalcraft.cli import main

if __name__ == "__main__":
    main()
