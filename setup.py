"""Build HostIdent package."""
import setuptools

with open('README.md') as f:
    long_desc = f.read()

setuptools.setup(
    name='hostident',
    version='0.1.0',
    description='Host and domain name helpers',
    long_description=long_desc,
    long_description_content_type='text/markdown',
    packages=setuptools.find_packages(exclude=['tests*', 'testing*']),
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: Apache Software License',
        'Operating System :: POSIX',
    ],
    python_requires='>=3.8',
    install_requires=[
        'click',
        'pydantic>=2',
        'tomli ; python_version<"3.11"',
        'tomli-w',
    ],
    extras_require={
        'dev': [
            'pytest',
            'pytest-cov',
        ],
    },
    entry_points={
        'console_scripts': [
            'hostident = hostident.cli:cli',
        ],
    },
)
