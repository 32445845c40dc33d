"""
Synchronous usage - No event loop
"""
import logging

from urlzip import StrCompressor, DecodeError, setup_logging


def main():
    logging.basicConfig(format='%(name)s - %(levelname)s - %(message)s')
    setup_logging(logging.DEBUG)

    compressor = StrCompressor()
    compressor.init_sync()

    token = compressor.compress("你好世界 🌍 مرحبا بالعالم")
    print(f"Token: {token}")
    print(f"Text:  {compressor.decompress(token)}")

    try:
        compressor.decompress("not-valid-base64!!!")
    except DecodeError as e:
        print(f"Rejected: {e}")


if __name__ == "__main__":
    main()
