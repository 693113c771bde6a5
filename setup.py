from pathlib import Path
from setuptools import setup, find_packages

projdir = Path(__file__).parent
readme = (projdir / 'README.md').read_text()

setup(
    name='uriv',
    version='0.1.0',
    packages=find_packages(exclude=['tests']),
    description='URI value type with an inline scanner',
    license='MIT',
    python_requires='>=3.6',
    install_requires=['termcolor>=2.1'],
    extras_require={
        'dev': ['pytest', 'mypy'],
    },
    entry_points={
        'console_scripts': ['uriv=uriv.cli:main']
    },
    long_description=readme,
    long_description_content_type='text/markdown',
)
