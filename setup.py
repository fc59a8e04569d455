#!/usr/bin/env python

from setuptools import setup

setup(name='pitchset',
      version='1.0',
      description='A python library for pitch class set analysis, triad recognition and cadence modelling',
      author='Andrey Barsky',
      author_email='andrey.barsky@gmail.com',
      install_requires=['numpy'],
      extras_require={
        'test': [ 'pytest' ]
      },
      packages = ['pitchset'],
      package_dir = {'pitchset': 'src'}
     )
