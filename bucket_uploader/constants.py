"""Default policy for the Bucket storage API."""

DEFAULT_BASE_URL = "https://bucket.ekilie.com"
UPLOAD_ENDPOINT = "/api/store/v1/index.php"

MAX_FILE_SIZE = 100 * 1024 * 1024  # 100 MiB
DEFAULT_TIMEOUT = 30.0  # seconds

IMAGE_EXTENSIONS = frozenset({'.jpg', '.jpeg', '.png', '.gif', '.webp', '.svg'})
DOCUMENT_EXTENSIONS = frozenset({
    '.pdf', '.txt', '.doc', '.docx', '.xls', '.xlsx', '.ppt', '.pptx',
})
ARCHIVE_EXTENSIONS = frozenset({'.zip', '.rar', '.tar', '.gz'})
DATA_EXTENSIONS = frozenset({'.json', '.xml'})
AUDIO_EXTENSIONS = frozenset({'.mp3', '.wav', '.ogg', '.m4a', '.flac'})

ALLOWED_EXTENSIONS = (
    IMAGE_EXTENSIONS
    | DOCUMENT_EXTENSIONS
    | ARCHIVE_EXTENSIONS
    | DATA_EXTENSIONS
    | AUDIO_EXTENSIONS
)
