"""Allow ``python -m yamlscope``."""

from yamlscope.cli import main

main()
