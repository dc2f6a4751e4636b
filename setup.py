# -*- coding: utf-8 -*-
"""
    socks4.py
    ~~~~~~~~~
    ⚡⚡⚡ Fast, Lightweight SOCKS4 and SOCKS4a client dialer, focused on
    tunneling TCP connections through proxy servers.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
from setuptools import setup, find_packages

VERSION = (1, 0, 0)
__version__ = '.'.join(map(str, VERSION[0:3]))
__description__ = '''⚡⚡⚡Fast, Lightweight SOCKS4 and SOCKS4a client dialer,
    focused on tunneling TCP connections through proxy servers.'''
__author__ = 'Abhinav Singh'
__author_email__ = 'mailsforabhinav@gmail.com'
__homepage__ = 'https://github.com/abhinavsingh/socks4.py'
__download_url__ = '%s/archive/master.zip' % __homepage__
__license__ = 'BSD'

if __name__ == '__main__':
    setup(
        name='socks4.py',
        version=__version__,
        author=__author__,
        author_email=__author_email__,
        url=__homepage__,
        description=__description__,
        long_description=open(
            'README.md', 'r', encoding='utf-8').read().strip(),
        long_description_content_type='text/markdown',
        download_url=__download_url__,
        license=__license__,
        python_requires='>=3.7',
        zip_safe=False,
        packages=find_packages(exclude=['tests', 'tests.*']),
        package_data={'socks4': ['py.typed']},
        install_requires=[],
        extras_require={
            'testing': [
                'pytest',
                'pytest-mock',
            ],
        },
        entry_points={
            'console_scripts': [
                'socks4 = socks4:entry_point'
            ]
        },
        classifiers=[
            'Development Status :: 5 - Production/Stable',
            'Environment :: Console',
            'Intended Audience :: Developers',
            'Intended Audience :: System Administrators',
            'License :: OSI Approved :: BSD License',
            'Natural Language :: English',
            'Operating System :: OS Independent',
            'Programming Language :: Python :: 3 :: Only',
            'Programming Language :: Python :: 3',
            'Topic :: Internet',
            'Topic :: Internet :: Proxy Servers',
            'Topic :: Software Development :: Libraries :: Python Modules',
            'Topic :: System :: Networking',
            'Typing :: Typed',
        ],
        keywords=(
            'socks, socks4, socks4a, proxy, proxy client, dialer, Python3'
        )
    )
