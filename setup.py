"""
file to set up python package, see https://setuptools.pypa.io/ for details.
"""

import os
import shutil

from setuptools import setup, Command

# Version number
version = '0.1'


def readme():
    with open('README.md') as f:
       return f.read()


class CleanCommand(Command):
    description = "Remove build directories, and compiled files (including .pyc)"
    user_options = []

    def initialize_options(self):
        pass

    def finalize_options(self):
        pass

    def run(self):
        if os.path.exists('build'):
            shutil.rmtree('build')
        for dirpath, dirnames, filenames in os.walk('numberrange'):
            for filename in filenames:
                if filename.endswith('.pyc'):
                    tmp_fn = os.path.join(dirpath, filename)
                    print("removing", tmp_fn)
                    os.unlink(tmp_fn)

setup(
    name='numberrange',
    version=version,
    description='Test if numbers fall within ranges such as 1..2,3..4,-10..-5',
    long_description=readme(),
    long_description_content_type='text/markdown',
    keywords='range integers set parsing',
    license='Apache 2.0',
    packages=[
        "numberrange.tests",
        "numberrange",
	],
    python_requires='>=3.8',
    install_requires = ['numpy'],
    extras_require = {'test': ['pytest']},
    cmdclass = {'clean': CleanCommand},
  )
