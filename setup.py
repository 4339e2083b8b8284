from setuptools import setup, find_packages

setup(
    name="playlist-duration",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=[
        "typer[all]",
        "rich",
        "toolz",
        "pymonad>=2.4.0",
        "google-api-python-client",
        "PyYAML",
    ],
    extras_require={
        "dev": [
            "pytest",
            "pytest-mock",
            "ruff",
            "setuptools",
            "wheel",
            "twine",
        ]
    },
    entry_points={
        "console_scripts": [
            "playlist-duration = playlist_duration.cli:app",
        ],
    },
    description="A CLI tool to calculate the total duration of YouTube playlists.",
    long_description=open("README.adoc").read(),
    long_description_content_type="text/asciidoc",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Environment :: Console",
        "Intended Audience :: End Users/Desktop",
        "Topic :: Multimedia :: Video",
        "Topic :: Internet :: WWW/HTTP",
    ],
    python_requires=">=3.9",
)
