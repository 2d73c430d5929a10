import sys

from fp_exercises.main import main

sys.exit(main())
