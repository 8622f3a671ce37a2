import os

from setuptools import setup

from oauth2storage import VERSION

setup(name="python-oauth2-storage",
      version=VERSION,
      description="MongoDB storage for OAuth 2.0 authorization servers",
      long_description=open("README.rst").read(),
      author="Markus Meyer",
      author_email="hydrantanderwand@gmail.com",
      packages=[d[0].replace("/", ".") for d in os.walk("oauth2storage")
                if not d[0].endswith("__pycache__")],
      python_requires=">=3.10",
      install_requires=[
        "pymongo>=4.0",
        "pydantic>=2.0",
        "pydantic-settings>=2.0"
      ],
      extras_require={
        "test": ["mock", "pytest"]
      },
      classifiers=[
        "Development Status :: 4 - Beta",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ]
)
