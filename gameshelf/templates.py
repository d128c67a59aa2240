# freedesktop.org Desktop Entry, one per installed game
DESKTOP_ENTRY = r"""[Desktop Entry]
Name={{ d.name|desktop_escape }}
Exec={{ d.exec }}
{% if d.icon %}Icon={{ d.icon|desktop_escape }}
{% endif %}Terminal=false
Type=Application
Categories={{ d.categories }}
"""
