import setuptools

import promptline.version

with open("README.md", "r") as readme:
    long_description = readme.read()

setuptools.setup(
    name='promptline',
    version=promptline.version.VERSION,
    description='Styled segments for terminal status lines',
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=setuptools.find_packages('.', include=['promptline', 'promptline.*']),
    scripts=['bin/promptline'],
    install_requires=[
        'prompt_toolkit>=3.0'
    ],
    extras_require={
        'test': ['pytest']
    },
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: GNU General Public License v3 (GPLv3)',
        'Operating System :: POSIX :: Linux'
    ],
    python_requires='>=3.8'
)
