import os
from setuptools import setup, find_packages


def get_version():
    basedir = os.path.dirname(__file__)
    with open(os.path.join(basedir, 'src/rangefmt/__version__.py')) as f:
        variables = {}
        exec(f.read(), variables)

        version = variables.get('__version__')
        if version:
            return version

    raise RuntimeError('No version info found.')


__version__ = get_version()

kwargs = dict(
    name='rangefmt',
    license='MIT',
    version=__version__,
    description='Render version ranges in normalized, legacy, short and pretty notations.',
    long_description=open('README.rst').read(),
    packages=find_packages('src'),
    package_dir={'': 'src'},
    python_requires='>=3.9.0',
    install_requires=[
        'cleo>=2.1.0,<3.0.0',
    ],
    extras_require={
        'test': [
            'pytest>=8.0.0,<9.0.0',
            'pytest-mock>=3.9.0,<4.0.0',
        ],
    },
    include_package_data=True,
    classifiers=[
        'Intended Audience :: Developers',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
    ],
    entry_points={
        'console_scripts': ['rangefmt = rangefmt.console.application:main']
    }
)


setup(**kwargs)
