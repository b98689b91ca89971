#!/usr/bin/env python
from setuptools import setup
import os


def get_version():
    curdir = os.path.dirname(__file__)
    filename = os.path.join(curdir, 'src', 'gfont2ts', 'version.py')
    with open(filename, 'rb') as fp:
        return fp.read().decode('utf8').split('=')[1].strip(" \n'")


def readme():
    with open('README.rst') as f:
        return f.read()


setup(
    name='gfont2ts',
    version=get_version(),
    description='Generate TypeScript font declarations from Google Fonts metadata',
    long_description=readme(),
    classifiers=[
        'Development Status :: 3 - Alpha',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Topic :: Software Development :: Code Generators',
        'Topic :: Text Processing :: Fonts',
    ],
    keywords='fonts google-fonts typescript codegen',
    url='https://github.com/kyamagu/gfont2ts',
    author='Kota Yamaguchi',
    author_email='KotaYamaguchi1984@gmail.com',
    license='MIT License',
    package_dir={'': 'src'},
    packages=[
        'gfont2ts',
        'gfont2ts.core',
    ],
    python_requires='>=3.10',
    install_requires=[
        'fonttools',
        'typing_extensions; python_version < "3.11"',
    ],
    extras_require={
        'test': [
            'pytest'],
    },
    include_package_data=True,
    entry_points={
        'console_scripts': ['gfont2ts=gfont2ts.__main__:main']
    },
    tests_require=['pytest'],
    )
