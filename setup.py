import setuptools

setuptools.setup(
	name='texpand',
	version='0.1.0',
	packages=[
		'texpand',
		'texpand.support',
	],
	description='A TeX-style macro preprocessor: \\def, \\if, \\include and friends, expanded to plain text',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	python_requires='>=3.9',
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Topic :: Text Processing :: Markup :: LaTeX",
		"Development Status :: 3 - Alpha",
	],
)
