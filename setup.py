from setuptools import setup, find_packages

setup(
    name="lvlog",
    version="0.1.0a0",
    description="Leveled console logging — aligned [time LEVEL] prefixes, terminal-aware ANSI color, trace hex dumps",
    packages=find_packages("src"),
    package_dir={"": "src"},
    install_requires=[
        "colorama>=0.4.6",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: System :: Logging",
    ],
    python_requires=">=3.10",
)
