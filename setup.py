from setuptools import setup, find_packages

setup(
    name="ddiff",
    version="0.3.0",
    packages=find_packages(include=["ddiff", "ddiff.*"]),
    install_requires=[
        "xxhash>=3.0",
        "rich>=13.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.8",
    description="Report files present in one directory tree but not the other, compared by content",
    entry_points={
        "console_scripts": [
            "ddiff=ddiff.cli:main",
        ]
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
