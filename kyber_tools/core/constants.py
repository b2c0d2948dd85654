"""Constants used throughout the Kyber Tools application."""


# Docker-related constants
DOCKER_EXECUTABLE = "docker"
KYBER_SERVER_IMAGE = "ghcr.io/armchairdevelopers/kyber-server:latest"

# Paths inside the Kyber server container
CONTAINER_LOG_PATH = (
    "/root/.local/share/maxima/wine/prefix/drive_c/users/root"
    "/AppData/Roaming/ArmchairDevelopers/Kyber/Logs"
)
CONTAINER_MODULE_PATH = "/root/.local/share/kyber/module"
GAME_DATA_MOUNT = "/mnt/battlefront"
MOD_FOLDER_MOUNT = "/mnt/battlefront/mods"
PLUGIN_FOLDER_MOUNT = "/mnt/battlefront/plugins"

# Module update
DEFAULT_MODULE_FILE = "Kyber.dll"
KYBER_DOWNLOAD_URL = (
    "https://github.com/LevelDreadnought/Kyber/raw/refs/heads/ver/beta10/Module/Kyber.dll"
)
BACKUP_SUFFIX = ".old"

# Files that may be pushed into a running container as a module update
ALLOWED_MODULE_FILES = frozenset({
    "kyber.dll",
    "vanillabundleaggregation.kb",
    "ca_root.pem",
    "vivoxsdk.dll",
})

# Launch configuration
DEFAULT_MODULE_CHANNEL = "main"
CONTAINER_NAME_CHARS = frozenset("abcdefghijklmnopqrstuvwxyz0123456789-_.")

# Environment variables understood by the Kyber server image
ENV_MAXIMA_CREDENTIALS = "MAXIMA_CREDENTIALS"
ENV_KYBER_TOKEN = "KYBER_TOKEN"
ENV_SERVER_NAME = "KYBER_SERVER_NAME"
ENV_MAX_PLAYERS = "KYBER_SERVER_MAX_PLAYERS"
ENV_MAP_ROTATION = "KYBER_MAP_ROTATION"
ENV_MODULE_CHANNEL = "KYBER_MODULE_CHANNEL"
ENV_SERVER_DESCRIPTION = "KYBER_SERVER_DESCRIPTION"
ENV_SERVER_PASSWORD = "KYBER_SERVER_PASSWORD"
ENV_MOD_FOLDER = "KYBER_MOD_FOLDER"
ENV_PLUGINS_PATH = "KYBER_SERVER_PLUGINS_PATH"

# Saved launch command file modes
SAVED_COMMAND_MODE = 0o644
EXECUTABLE_MODE = 0o755

# Logging
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
