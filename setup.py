"""groebnerzx setup script.

Options:                python setup.py --help
Install by admin/root:  python setup.py install
Install by user:        python setup.py install --user
Install options:        python setup.py install --help
"""

from setuptools import setup
import groebnerzx

with open('README.md', 'r') as f:
    LONG_DESCRIPTION = f.read()

setup(
    name='groebnerzx',
    version=groebnerzx.__version__,
    description='groebnerzx -- Buchberger-style bases for ideals in Z[x]',
    long_description=LONG_DESCRIPTION,
    long_description_content_type='text/markdown',
    keywords=['polynomials', 'ideals', 'Groebner basis', 'Buchberger algorithm',
              'integer polynomials', 'Karatsuba multiplication', 'computer algebra'],
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Environment :: Console',
        'Intended Audience :: Education',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: GNU General Public License v3 (GPLv3)',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3 :: Only',
        'Topic :: Scientific/Engineering :: Mathematics',
        'Topic :: Software Development :: Libraries :: Python Modules'
    ],
    license=groebnerzx.__license__,
    packages=['groebnerzx'],
    platforms=['any'],
    install_requires=['gmpy2>=2.1'],
    entry_points={'console_scripts': ['groebnerzx=groebnerzx.__main__:main']},
    python_requires='>=3.8'
)
