# ------------------------------------------------------------------------------
# Name:          setup.py
# Purpose:       install musicxml21 package
#
# Authors:       The musicxml21 developers
#
# Copyright:     (c) 2026 The musicxml21 developers
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------

import setuptools

# must be kept up to date with musicxml21/__init__.py:__version__
musicxml21version = '1.0.0'

if __name__ == '__main__':
    setuptools.setup(
        name='musicxml21',
        version=musicxml21version,

        description='A MusicXML score-partwise reader and writer (with conversion to music21 objects)',
        long_description=open('README.md', encoding='utf-8').read(),
        long_description_content_type='text/markdown',

        author='The musicxml21 developers',

        classifiers=[
            'Development Status :: 4 - Beta',
            'License :: OSI Approved :: MIT License',
            'Programming Language :: Python :: 3 :: Only',
            'Operating System :: OS Independent',
            'Natural Language :: English',
        ],

        keywords=[
            'music',
            'score',
            'notation',
            'MusicXML',
            'partwise',
            'MIDI',
            'writer',
            'parser',
            'reader',
            'music21',
        ],

        packages=setuptools.find_packages(exclude=['tests', 'tests.*']),

        python_requires='>=3.10',

        install_requires=[
            'music21>=9.1',
        ],

        extras_require={
            'test': ['pytest'],
        },
    )
