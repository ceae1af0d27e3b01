from setuptools import setup, find_namespace_packages

setup(
    name='github-pr-dashboard',
    version='0.1.0',
    description='Terminal dashboard of open GitHub pull requests across repositories',
    packages=find_namespace_packages(include=['github_pr_dashboard', 'github_pr_dashboard.*']),
    python_requires='>=3.9',
    install_requires=[
        'PyGithub>=2.1',
        'keyring',
        'requests',
        'rich',
        'textual>=0.47',
    ],
    extras_require={
        'test': ['pytest', 'pytest-asyncio'],
    },
    entry_points={
        'console_scripts': ['github-pr-dashboard=github_pr_dashboard.main:main'],
    },
)
