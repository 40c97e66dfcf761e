from setuptools import setup, find_packages

setup(
    name="devlog",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    description="Development-gated console logger with caller file prefixes",
    author="Mat Davis",
    python_requires='>=3.7',
    install_requires=[
        "PyYAML>=6.0",            # For YAML settings files
    ],
    extras_require={
        "test": [
            "pytest>=7.0",        # Optional runner, the tests are plain unittest
        ],
    },
    # Entry points for command-line scripts
    entry_points={
        'console_scripts': [
            'devlog=devlog.cli:main',
        ],
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Programming Language :: Python :: 3',
        'Topic :: System :: Logging',
    ],
)
