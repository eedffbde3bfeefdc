#!/usr/bin/env python

"""The setup script."""

from setuptools import setup, find_packages

with open('README.rst') as readme_file:
    readme = readme_file.read()

with open('HISTORY.rst') as history_file:
    history = history_file.read()

requirements = ['PySide6>=6.1.2',
                'PyYAML>=5.1',
]

test_requirements = ['pytest>=3', ]

setup(
    author="Jasam",
    author_email='ammar.sherfawi@gmail.com',
    python_requires='>=3.10',
    classifiers=[
        'Development Status :: 2 - Pre-Alpha',
        'Environment :: Win32 (MS Windows)',
        'Environment :: MacOS X',
        'Environment :: X11 Applications',
        'Intended Audience :: End Users/Desktop',
        'Natural Language :: English',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Topic :: Utilities',
    ],
    description="Countdown timer and stopwatch with laps",
    entry_points={
        'console_scripts': [
            'timekeeper=timekeeper.main:main',
        ],
    },
    extras_require={'test': test_requirements},
    install_requires=requirements,
    long_description=readme + '\n\n' + history,
    include_package_data=True,
    keywords='timekeeper',
    name='timekeeper',
    packages=find_packages(include=['timekeeper', 'timekeeper.*']),
    package_data={'timekeeper': ['config.yaml']},
    test_suite='tests',
    tests_require=test_requirements,
    url='https://github.com/jasam-sheja/timekeeper',
    version='0.1.0',
    zip_safe=False,
)
