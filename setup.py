"""Install the tokenauth package."""

from setuptools import setup, find_packages

setup(
    name='tokenauth',
    version='0.1.0',
    packages=find_packages(exclude=['*test*']),
    install_requires=[
        "bcrypt",
        "click",
        "flask",
        "flask-sqlalchemy",
        "python-json-logger",
        "pytz",
        "sqlalchemy",
        "werkzeug",
    ],
    extras_require={
        'test': [
            "hypothesis",
            "pyjwt",
            "pytest",
        ],
    },
    zip_safe=False
)
