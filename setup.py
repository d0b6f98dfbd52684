#!/usr/bin/env python
# Encoding: utf-8
# See: <http://docs.python.org/distutils/introduction.html>
import os
from setuptools import setup

NAME        = "nestcss"
WEBSITE     = "http://www.github.com/sebastien/nestcss"
SUMMARY     = "Compiler for nested stylesheets."
DESCRIPTION = """\
Resolves the parent references of nested stylesheet rules and flattens them
into plain CSS, in the nested, expanded, compact or compressed style.
"""
LONG_DESCRIPTION  = None
if os.path.exists("README.md"):
	LONG_DESCRIPTION = open("README.md").read()

VERSION = eval([_.rsplit("=",1)[1] for _ in open("src/nestcss/__init__.py").readlines() if _.startswith("VERSION")][0])

setup(
	name             = NAME,
	version          = VERSION,
	description      = DESCRIPTION,
	long_description = LONG_DESCRIPTION,
	long_description_content_type = "text/markdown",
	author           = "Sébastien Pierre",
	author_email     = "sebastien.pierre@gmail.com",
	url              =  WEBSITE,
	keywords         = ["css", "pre-processor", "nested rules", "selectors"],
	install_requires = ["tinycss2",],
	extras_require   = {"test": ["pytest"]},
	python_requires  = ">=3.7",
	packages         = ["nestcss"],
	package_dir      = {"nestcss":"src/nestcss"},
	scripts          = ["bin/ncss"],
	license          = "License :: OSI Approved :: BSD License",
	# SEE: https://pypi.python.org/pypi?%3Aaction=list_classifiers
	classifiers      = [
		"Programming Language :: Python",
		"Programming Language :: Python :: 3",
		"Development Status :: 4 - Beta",
		"Natural Language :: English",
		"Environment :: Console",
		"Intended Audience :: Developers",
		"Operating System :: OS Independent",
		"Topic :: Utilities"
	],
)

# EOF - vim: ts=4 sw=4 noet
