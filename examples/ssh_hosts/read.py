# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Read example.conf and print an ssh command line for every host."""

from __future__ import annotations

from pathlib import Path

from genro_confindent import Confindent


def main() -> None:
    conf = Confindent.from_file(Path(__file__).parent / 'example.conf')

    for host in conf.children('Host'):
        username = host.child_value('Username', 'root')
        ports = host.child('Ports')
        port = ports.value_list(int)[0] if ports is not None else 22
        print(f"ssh {username}@{host.value} -p {port}")

    idle = conf.child_parse('Idle', int)
    print(f"Idle timeout: {idle // 60} minutes")


if __name__ == '__main__':
    main()
