import os

NFT_BINARY = os.environ.get('NFT_BINARY', 'nft')

NFTLIB_BACKEND = os.environ.get('NFTLIB_BACKEND', 'process')

DEBUG = os.environ.get('NFTLIB_DEBUG') in ['1', 'true', 'on']
