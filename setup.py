import pathlib
import re
import sys

from setuptools import setup

if sys.version_info < (3, 9):
    raise RuntimeError("httpauth requires Python 3.9+")


HERE = pathlib.Path(__file__).parent

txt = (HERE / "httpauth" / "__init__.py").read_text("utf-8")
try:
    version = re.findall(r'^__version__ = "([^"]+)"\r?$', txt, re.M)[0]
except IndexError:
    raise RuntimeError("Unable to determine version.")


setup(
    name="httpauth",
    version=version,
    description="Client side HTTP Basic and Digest authentication",
    license="Apache 2",
    classifiers=[
        "License :: OSI Approved :: Apache Software License",
        "Intended Audience :: Developers",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Development Status :: 5 - Production/Stable",
        "Operating System :: OS Independent",
        "Topic :: Internet :: WWW/HTTP",
    ],
    packages=["httpauth"],
    python_requires=">=3.9",
    install_requires=[
        "attrs>=17.3.0",
        "multidict>=4.5,<7.0",
        "yarl>=1.9,<2.0",
    ],
    extras_require={
        "test": ["pytest"],
    },
    include_package_data=True,
)
