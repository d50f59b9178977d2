#!/usr/bin/env python3

from setuptools import setup, find_packages

requires = [
    "discord.py (>=2.0,<3.0)",
    "sqlalchemy (>=1.4,<3.0)",
]

extras = {
    "test": ["pytest"],
}

setup(name='RPN-bot',
      version='1.0.0',
      description='Discord bot and command line tool for converting infix expressions to postfix and evaluating them',
      install_requires=requires,
      extras_require=extras,
      scripts=['rpn-bot.py', 'rpn-eval.py'],
      packages=find_packages(exclude=['tests']))
