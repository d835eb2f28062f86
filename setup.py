from setuptools import setup, find_packages

setup(
    name='rosactl',
    version='0.1.0',
    packages=find_packages(),
    include_package_data=True,
    install_requires=[
        'typer[all]',
        'pydantic>=2',
        'python-dotenv',
        'pyyaml',
        'requests'
    ],
    extras_require={
        'test': ['pytest']
    },
    entry_points={
        'console_scripts': [
            'rosactl=rosactl.cli:app'
        ]
    },
    author='Your Name',
    description='A command-line administration tool for managed OpenShift clusters',
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
    ],
    python_requires='>=3.8',
)
