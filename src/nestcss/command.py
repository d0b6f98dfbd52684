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

import os, sys, argparse, time, logging
from  .model     import Options, Style, DebugMode, SyntaxError, SemanticError
from  .processor import SourceProcessor
from  .compiler  import Compiler
from  .writer    import CSSWriter

log = logging.getLogger("nestcss")

def parse( path, options=None ):
	"""Compiles the stylesheet at the given path and returns the CSS."""
	return Compiler(options).compile(SourceProcessor(path).parsePath(path))

def parseString( text, path=None, options=None ):
	"""Compiles the given stylesheet source and returns the CSS."""
	return Compiler(options).compile(SourceProcessor(path).process(text))

def parseDefinitions( definitions ):
	variables = {}
	for _ in definitions or ():
		if "=" not in _:
			raise ValueError("Expected NAME=VALUE, got `{0}`".format(_))
		name, value = _.split("=", 1)
		variables[name.strip().lstrip("$")] = value.strip()
	return variables

def run( args ):
	"""Processes the command line arguments, returning the exit status."""
	USAGE = "ncss FILE..."
	if type(args) not in (type([]), type(())): args = [args]
	oparser = argparse.ArgumentParser(
		prog        = "ncss",
		description = "Compiles nested stylesheets to CSS"
	)
	oparser.add_argument("files", metavar="FILE", type=str, nargs='*', help='The stylesheets to compile, `-` for the standard input')
	oparser.add_argument("-v", "--verbose",  dest="verbose",  action="store_true", default=False)
	oparser.add_argument("-o", "--output",   type=str,  dest="output", default=None)
	oparser.add_argument("-t", "--style",    dest="style", choices=[_.value for _ in Style], default=Style.NESTED.value, help="The output style")
	oparser.add_argument("-D", "--define",   dest="define", action="append", default=[], metavar="NAME=VALUE", help="Defines a variable")
	oparser.add_argument("--base",           dest="base", type=str, default=None, help="Directory the filenames of the line comments are relative to")
	oparser.add_argument("--profile",        dest="profile", action="store_true", default=False, help="Profiles the parsing/compiling/writing time")
	debug = oparser.add_mutually_exclusive_group()
	debug.add_argument("--line-comments",    dest="debug", action="store_const", const=DebugMode.COMMENT.value, default=DebugMode.NONE.value, help="Annotates each rule with a comment giving its source line")
	debug.add_argument("--debug-info",       dest="debug", action="store_const", const=DebugMode.STRUCTURED.value, help="Annotates each rule with structured debug information")
	# We create the parse and register the options
	args = oparser.parse_args(args=args)
	logging.basicConfig(format="%(levelname)s %(message)s")
	log.setLevel(logging.DEBUG if args.verbose else logging.INFO)
	if not args.files:
		sys.stderr.write(USAGE + "\n")
		return 1
	try:
		variables = parseDefinitions(args.define)
	except ValueError as e:
		log.error(str(e))
		return 1
	base = args.base
	if base is None and args.output:
		base = os.path.dirname(os.path.abspath(args.output))
	options  = Options(style=args.style, debug=args.debug, basePath=base, variables=variables)
	output   = open(args.output, "w") if args.output else sys.stdout
	compiler = Compiler(options)
	writer   = CSSWriter(options, output)
	status   = 0
	try:
		for path in args.files:
			start_time = time.time()
			try:
				if path == "-":
					stylesheet = SourceProcessor().process(sys.stdin.read())
				elif not os.path.exists(path):
					log.error("Could not find path: {0}".format(path))
					status = 1
					continue
				else:
					stylesheet = SourceProcessor(path).parsePath(path)
				parse_time   = time.time()
				result       = compiler.process(stylesheet)
				process_time = time.time()
				writer.write(result)
				write_time   = time.time()
			except (SyntaxError, SemanticError) as e:
				log.error("Compilation of `{0}` failed: {1}".format(path, e))
				status = 1
				continue
			if args.profile:
				parse_d   = parse_time    - start_time
				process_d = process_time  - parse_time
				write_d   = write_time    - process_time
				total_d   = (parse_d + write_d + process_d) or 1.0
				log.info("Parsing time    {0:0.4f}s {1:0.0f}%".format(parse_d,   100.0 * parse_d   / total_d))
				log.info("Compiling time  {0:0.4f}s {1:0.0f}%".format(process_d, 100.0 * process_d / total_d))
				log.info("Writing time    {0:0.4f}s {1:0.0f}%".format(write_d,   100.0 * write_d   / total_d))
	finally:
		if args.output:
			output.close()
	return status

if __name__ == "__main__":
	sys.exit(run(sys.argv[1:]))

# EOF - vim: ts=4 sw=4 noet
