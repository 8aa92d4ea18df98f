#!/usr/bin/env python3
'''
 $ pngmsg.py encode image.png ruSt "hello world"
 $ pngmsg.py decode image.png ruSt
 $ pngmsg.py print image.png
 $ pngmsg.py remove image.png ruSt
'''
import sys

from pngme.cli import main


if __name__ == '__main__':
    sys.exit(main())
