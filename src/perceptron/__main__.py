import sys

from perceptron.cli import main

sys.exit(main())
