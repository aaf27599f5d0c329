#!/usr/bin/env python

from setuptools import setup

setup(name='llkit',
      version='0.1',
      description='Context-free grammar analysis for table-driven LL(1) parsing.',
      py_modules=['llkit', 'clex'],
      python_requires='>=3.6',
      entry_points={
          'console_scripts': [
              'llkit = llkit:main',
              'clex = clex:main',
          ],
      },
)
