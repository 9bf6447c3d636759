"""Allow ``python -m fuzzymatch``."""

from fuzzymatch import main

main()
