#!/usr/bin/env python3
# encoding=utf8 ---------------------------------------------------------------
# Project           : NestedCSS
# -----------------------------------------------------------------------------
# Author            : FFunction
# License           : BSD License
# -----------------------------------------------------------------------------
# Creation date     : 18-Oct-2026
# Last modification : 18-Oct-2026
# -----------------------------------------------------------------------------

from .model    import Options, Style, DebugMode, SyntaxError, SemanticError, UnboundParentReference
from .compiler import Compiler
from .command  import run, parse, parseString

VERSION    = "0.1.0"
LICENSE    = "http://ffctn.com/doc/licenses/bsd"

__doc__ = """
Compiler for nested stylesheets. Rules can be nested within rules and
refer to their parent's selector with `&`: the compiler resolves the
selectors and flattens the rules into plain CSS, using the `nested`,
`expanded`, `compact` or `compressed` output style.
"""

if __name__ == "__main__":
	import sys
	sys.exit(run(sys.argv[1:]))

# EOF
