"""GTA V SaveLoad Helper - Save slot manager for Grand Theft Auto V.

This tool provides:
    - Saving the current save files of every profile into named slots
    - Loading a slot (or an archived "Save Files" set) back into the profile
    - Dated snapshots, clearing a profile, and recency-ranked slot operations

Every operation is applied to each profile found under
<home>/Documents/Rockstar Games/GTA V/Profiles.

Package Structure:
    app: Command-line entry point
    cli: Argument parsing and the Command model
    config: Configuration management, paths, schemas, and path validation
    core: Directory scanning, slot management, file transfer, and dispatch

Quick Start:
    Run from command line::

        python -m gtav_saveload --save before-heist
        python -m gtav_saveload --load before-heist

Configuration:
    - Config file: %APPDATA%/GTAVSaveLoad/configuration.xml
    - Log file: %APPDATA%/GTAVSaveLoad/gtav_saveload.log
"""

__version__ = "0.3.0"
__app_name__ = "GTA V SaveLoad Helper"
