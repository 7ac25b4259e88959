from glob import glob
from setuptools import setup


setup(
    name='shunt',
    version='0.1.0',
    description='Infix calculator: shunting-yard to postfix, then a stack machine',
    install_requires=[
        'regex',
        'prompt_toolkit',
    ],
    packages=['shunt'],
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    python_requires='>=3.6',
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'shunt-calc = shunt.cli:main',
        ],
    },
    scripts=glob('bin/*'),
    license='ISC',
)
