import sys

from drbd8store.commands.storage import main

if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
