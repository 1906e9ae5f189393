# Basic setup.py to support testing and installation.
#
# Supports:
# - pip install .
# - pip install -e .[test]
#
# Does not support:
# - python setup.py version  (edit py/mapmaker/_version.py instead)

import re
from setuptools import setup, find_packages

def _get_version():
    with open('py/mapmaker/_version.py') as fx:
        line = fx.readline().strip()
    m = re.match(r"__version__\s*=\s*'(.*)'", line)
    if m is None:
        print('ERROR: Unable to parse version from: {}'.format(line))
        version = 'unknown'
    else:
        version = m.groups()[0]

    return version

#- Basic info
setup_keywords = dict(
    name='mapmaker',
    version=_get_version(),
    description='Axis-aligned coordinate mappings between rectangular extents',
    license='BSD',
    python_requires='>=3.9',
)

#- boilerplate, not sure if this is needed
setup_keywords['zip_safe'] = False

#- What to install
setup_keywords['packages'] = find_packages('py')
setup_keywords['package_dir'] = {'':'py'}

#- Data to include
setup_keywords['package_data'] = {
    'mapmaker': ['data/*',],
}

#- Dependencies
setup_keywords['install_requires'] = ['numpy', 'astropy', 'pyyaml']
setup_keywords['extras_require'] = {'test': ['pytest']}

#- Go!
setup(**setup_keywords)
