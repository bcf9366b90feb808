# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Build a configuration in code and write it next to this script."""

from __future__ import annotations

from pathlib import Path

from genro_confindent import Confindent


def main() -> None:
    conf = Confindent()
    conf.add_comment(' Generated by write.py')
    host = conf.create_child('Host', 'example.net')
    host.create_child('Username', 'gerald')
    host.create_child('Password', 'qwerty')
    conf.create_child('Idle', '3600')

    target = Path(__file__).parent / 'example_write.conf'
    conf.save(target)
    print(target.read_text())


if __name__ == '__main__':
    main()
