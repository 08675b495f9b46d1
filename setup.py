#!/usr/bin/python3

from setuptools import setup

setup(name='mutable_types',
      version='0.1.0',
      description='Mutable boolean, integer, rational, real and complex boxes',
      classifiers=[
          'Development Status :: 3 - Alpha',
          'License :: OSI Approved :: GNU General Public License v3 (GPLv3)',
          'Programming Language :: Python :: 3.11',
          'Topic :: Scientific/Engineering :: Mathematics',
      ],
      packages=['mutable_types'],
      python_requires='>=3.11',
      install_requires=[],
      extras_require={'test': ['pytest']},
      zip_safe=False)
