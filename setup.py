#!/usr/bin/env python

from setuptools import setup

import pidarts


read_md = lambda f: open(f, 'r').read()


setup(name='pidarts',
      version="{ver}.{rev}".format(
          ver=pidarts.__version__,
          rev=pidarts.__revision__,
      ),
      description='Pi on the Dart Board: a farmer dispatching Monte Carlo '
                  'darts to concurrent dart boards',
      long_description=read_md('README.md'),
      long_description_content_type="text/markdown",
      author='pidarts Development Team',
      install_requires=['greenlet>=0.4.0',
                        'pyzmq>=17.0.0'],
      packages=['pidarts',
                'pidarts._comm'],
      python_requires='>=3.6',
      platforms=['any'],
      keywords=['monte carlo',
                'pi',
                'farmer worker',
                'Concurrency',
                'greenlet',
                'zmq'],
      license='LGPL',
      classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Education',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: GNU Library or Lesser General Public '
        'License (LGPL)',
        'Programming Language :: Python :: 3',
        'Topic :: Scientific/Engineering',
        ],
     )
