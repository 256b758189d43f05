"""Import classes and definitions used for input/output."""

from .logging import configure_logging as configure_logging
from .logging import console as console
from .pose_paths import MalformedRecordError as MalformedRecordError
from .pose_paths import decode_path as decode_path
from .pose_paths import encode_path as encode_path
from .pose_paths import export_pose_path as export_pose_path
from .pose_paths import load_pose_path as load_pose_path
from .pose_paths import parse_path_text as parse_path_text
from .yaml_utils import export_yaml_data as export_yaml_data
from .yaml_utils import load_yaml_data as load_yaml_data
