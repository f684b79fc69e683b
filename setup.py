from setuptools import setup, find_packages

setup(
    name='lispcss',
    version='0.1.0',
    py_modules=['lispcss', 'compiler'],
    packages=find_packages(),
    install_requires=[
        'lark',
        'pydantic>=2.0',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'lispcss = lispcss:main',
        ],
    },
)
