"""Allow running the solver with `python -m typeshift`."""

from typeshift import main

main()
