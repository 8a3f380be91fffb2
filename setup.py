import setuptools

setuptools.setup(
	name='rawquote',
	version='0.1.0',
	packages=[
		'rawquote',
		'rawquote.scanning',
		'rawquote.support',
	],
	python_requires='>=3.9',
	description='Scanner and normalizer for verbatim, indentation-stripped, multi-line string literals',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Topic :: Software Development :: Compilers",
		"Development Status :: 3 - Alpha",
    ],
)
