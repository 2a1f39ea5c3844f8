from setuptools import setup
import os
import re


def main():
    this_directory = os.path.abspath(os.path.dirname(__file__))
    with open(os.path.join(this_directory, 'README.rst'), 'r') as f:
        long_description = f.read()
    with open(os.path.join(this_directory, 'crnparse', '__init__.py')) as f:
        version = re.search(r"^__version__ = '([^']+)'", f.read(),
                            re.M).group(1)

    setup(name='crnparse',
          version=version,
          description='Parser for chemical reaction network text files',
          long_description=long_description,
          long_description_content_type='text/x-rst',
          packages=['crnparse', 'crnparse.export', 'crnparse.importers',
                    'crnparse.examples', 'crnparse.testing',
                    'crnparse.tests'],
          python_requires='>=3.6',
          install_requires=['numpy', 'scipy>=1.1', 'sympy>=1.6', 'networkx'],
          extras_require={'test': ['pytest']},
          keywords=['chemical', 'reaction', 'network', 'parser'],
          classifiers=[
            'Development Status :: 4 - Beta',
            'Intended Audience :: Science/Research',
            'License :: OSI Approved :: BSD License',
            'Operating System :: OS Independent',
            'Programming Language :: Python :: 3',
            'Topic :: Scientific/Engineering :: Chemistry',
            'Topic :: Text Processing',
            ],
          )


if __name__ == '__main__':
    main()
