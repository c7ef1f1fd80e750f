import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="pybreachvip",
    version="0.1.0",
    description="Command-line client for the breach.vip search API",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=["pybreachvip"],
    package_data={"pybreachvip": ["VERSION"]},
    install_requires=["requests>=2.25"],
    extras_require={"test": ["pytest"]},
    entry_points={
        "console_scripts": [
            "pybreachvip=pybreachvip.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Operating System :: Microsoft :: Windows",
        "Operating System :: MacOS :: MacOS X",
        "Operating System :: POSIX :: Linux",
        "Topic :: Security",
    ],
    python_requires=">=3.9",
)
