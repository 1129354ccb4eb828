import sys

from quantum_cube.cli.play import main

sys.exit(main())
