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
    name='iscsiha',
    version='0.3.1',
    description='Pacemaker resource orchestration for highly available iSCSI '
        'targets',
    packages=find_packages(exclude=["iscsiha_test", "iscsiha_test.*"]),
    python_requires='>=3.9',
    install_requires=[
        'dacite',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    zip_safe=False,
    cmdclass={
        'clean': CleanCommand,
    }
)
