#!/usr/bin/env python
from setuptools import setup

setup(
	name="packetgen",
	version="0.1.0",
	description="Generate packet structures, codecs and a packet registry from declarative packet definitions",
	packages=["packetgen"],
	python_requires=">=3.9",
	install_requires=[
		"pyyaml",
	],
	entry_points={
		"console_scripts": [
			"packetgen=packetgen.generate:main",
		],
	},
)
