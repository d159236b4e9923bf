import sys

from tictactoe_ai.demo import main

sys.exit(main())
