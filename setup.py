"""
Packaging script for PyPI.
"""
import setuptools

setuptools.setup(
	name='parsnip-combinators',
	author='Beth Kjos',
	author_email='kjosib@gmail.com',
	version='0.1.0',
	packages=['parsnip', ],
	entry_points={
		'console_scripts': ["parsnip = parsnip.cmdline:main"],
	},
	license='MIT',
	description='List-of-successes parser combinators, with a tiny expression language built on them',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Development Status :: 3 - Alpha",
		"Intended Audience :: Developers",
		"Intended Audience :: Education",
		"Topic :: Software Development :: Compilers",
		"Topic :: Education",
		"Environment :: Console",
    ],
	python_requires='>=3.9',
	install_requires=[
		"booze-tools>=0.6.2.1",
	],
	extras_require={
		'test': ["hypothesis", ],
	},
)
