from setuptools import setup, find_packages
import os
import sys


def create_git_hook():
    """
    Create a pre-commit git hook to run the tests before committing code.
    """
    git_hooks_dir = os.path.join(os.getcwd(), '.git', 'hooks')
    pre_commit_path = os.path.join(git_hooks_dir, 'pre-commit')

    if not os.path.exists(git_hooks_dir):
        print("Not a git repository. Skipping git hook installation.")
        return

    # Interpreter used for the pip installation
    python_executable = sys.executable

    hook_content = f"""#!/bin/bash
"{python_executable}" run_tests.py
if [ $? -ne 0 ]; then
  echo "Tests failed. Aborting commit."
  exit 1
fi
"""

    with open(pre_commit_path, 'w') as hook_file:
        hook_file.write(hook_content)

    os.chmod(pre_commit_path, 0o775)
    print("Pre-commit hook created at .git/hooks/pre-commit")


create_git_hook()

setup(
    name="geoUnits",
    version="1.0.0",
    packages=find_packages(include=['geoUnits', 'geoUnits.*']),
    include_package_data=True,
    author="Rufat Kulakhmetov",
    author_email="rufat@criticalenergy.co",
    description="Dimension-tagged quantities and unit conversions",
    python_requires='>=3.9',
    install_requires=[
        'numpy>=2.0',
        'rich',
        'pint',
        'pyyaml',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
