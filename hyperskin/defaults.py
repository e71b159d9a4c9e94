"""
(C) 2026 Joseph Tingiris (joseph.tingiris@gmail.com)

Default values baked into hyperskin.

Callers must deep-copy (or `deep_merge` over) these before mutating them.
"""
from __future__ import annotations

from typing import Any

# top-level Windows Terminal settings owned by hyperskin; everything else in
# settings.json is passed through untouched
WT_GLOBAL_KEYS = (
    'defaultProfile',
    'theme',
    'alwaysShowTabs',
    'showTabsInTitlebar',
    'copyOnSelect',
    'copyFormatting',
    'wordDelimiters',
    'confirmCloseAllTabs',
    'startOnUserLogin',
    'initialPosition',
    'initialCols',
    'initialRows',
    'launchMode',
    'snapToGridOnResize',
    'useAcrylicInTabRow',
    'showTerminalTitleInTitlebar',
    'tabWidthMode',
    'disableAnimations',
)

DEFAULT_HISTORY_SIZE = 9001

# package family names, checked in order: stable, preview, canary
WT_PACKAGE_NAMES = (
    'Microsoft.WindowsTerminal_8wekyb3d8bbwe',
    'Microsoft.WindowsTerminalPreview_8wekyb3d8bbwe',
    'Microsoft.WindowsTerminalCanary_8wekyb3d8bbwe',
)

DEFAULT_WT_COLOR_SCHEME: dict[str, str] = {
    'name': 'HyperSkin Default',
    'background': '#0C0C0C',
    'foreground': '#CCCCCC',
    'cursorColor': '#FFFFFF',
    'selectionBackground': '#FFFFFF',
    'black': '#0C0C0C',
    'red': '#C50F1F',
    'green': '#13A10E',
    'yellow': '#C19C00',
    'blue': '#0037DA',
    'purple': '#881798',
    'cyan': '#3A96DD',
    'white': '#CCCCCC',
    'brightBlack': '#767676',
    'brightRed': '#E74856',
    'brightGreen': '#16C60C',
    'brightYellow': '#F9F1A5',
    'brightBlue': '#3B78FF',
    'brightPurple': '#B4009E',
    'brightCyan': '#61D6D6',
    'brightWhite': '#F2F2F2',
}

DEFAULT_WT_PROFILE: dict[str, Any] = {
    'fontFace': 'Cascadia Code',
    'fontSize': 12,
    'fontWeight': 'normal',
    'cursorShape': 'bar',
    'useAcrylic': False,
    'acrylicOpacity': 0.5,
    'opacity': 100,
    'padding': '8, 8, 8, 8',
    'scrollbarState': 'visible',
    'bellStyle': 'none',
    'closeOnExit': 'graceful',
    'antialiasingMode': 'grayscale',
    'historySize': DEFAULT_HISTORY_SIZE,
}

DEFAULT_HYPER_CONFIG: dict[str, Any] = {
    'config': {
        'fontSize': 14,
        'fontFamily': '"JetBrains Mono", Menlo, "DejaVu Sans Mono", Consolas, "Lucida Console", monospace',
        'fontWeight': 'normal',
        'fontWeightBold': 'bold',
        'lineHeight': 1.2,
        'letterSpacing': 0,
        'cursorColor': 'rgba(248,28,229,0.8)',
        'cursorAccentColor': '#000',
        'cursorShape': 'BLOCK',
        'cursorBlink': False,
        'foregroundColor': '#fff',
        'backgroundColor': '#000',
        'selectionColor': 'rgba(248,28,229,0.3)',
        'borderColor': '#333',
        'css': '',
        'termCSS': '',
        'workingDirectory': '',
        'showHamburgerMenu': '',
        'showWindowControls': '',
        'padding': '12px 14px',
        'colors': {
            'black': '#000000',
            'red': '#C51E14',
            'green': '#1DC121',
            'yellow': '#C7C329',
            'blue': '#0A2FC4',
            'magenta': '#C839C5',
            'cyan': '#20C5C6',
            'white': '#C7C7C7',
            'lightBlack': '#686868',
            'lightRed': '#FD6F6B',
            'lightGreen': '#67F86F',
            'lightYellow': '#FFFA72',
            'lightBlue': '#6A76FB',
            'lightMagenta': '#FD7CFC',
            'lightCyan': '#68FDFE',
            'lightWhite': '#FFFFFF',
        },
        'shell': '',
        'shellArgs': [],
        'env': {},
        'bell': 'SOUND',
        'copyOnSelect': False,
        'defaultSSHApp': True,
        'quickEdit': False,
        'webGLRenderer': True,
        'disableLigatures': False,
        'disableAutoUpdates': False,
        'screenReaderMode': False,
        'preserveCWD': True,
        'macOptionSelectionMode': 'vertical',
        'webLinksActivationKey': '',
    },
    'plugins': [],
    'localPlugins': [],
    'keymaps': {},
}

DEFAULT_APP_SETTINGS: dict[str, Any] = {
    'userName': 'Developer',
    'greetingEnabled': True,
    'hyperConfigPath': '',
    'wtSettingsPath': '',
    'defaultTerminal': 'windows-terminal',
    'persistentHistory': False,
    'historySize': DEFAULT_HISTORY_SIZE,
    'scanDirectories': [],
}

# slot name -> default value for the settings store
DEFAULT_STORE: dict[str, Any] = {
    'settings': DEFAULT_APP_SETTINGS,
    'projects': [],
    'claudeInstances': [],
    'themePresets': [],
}

CLAUDE_MODELS = (
    'claude-opus-4-6',
    'claude-sonnet-4-6',
    'claude-haiku-4-5-20251001',
)
