#!/usr/bin/python3

import os

from setuptools import setup, Command, find_packages


class CleanCommand(Command):
    user_options = []
    def initialize_options(self):
        #pylint: disable=attribute-defined-outside-init
        self.cwd = None
    def finalize_options(self):
        #pylint: disable=attribute-defined-outside-init
        self.cwd = os.getcwd()
    def run(self):
        assert os.getcwd() == self.cwd, 'Must be in package root: %s' % self.cwd
        os.system('rm -rf ./build ./dist ./*.pyc ./*.egg-info')

setup(
    name='crmcib',
    version='0.1.0',
    description='Model of the Pacemaker Cluster Information Base',
    packages=find_packages(exclude=["crmcib_test", "crmcib_test.*"]),
    python_requires='>=3.9',
    install_requires=[
        'lxml',
        'dacite',
    ],
    extras_require={
        'test': ['pytest'],
    },
    zip_safe=False,
    cmdclass={
        'clean': CleanCommand,
    }
)
