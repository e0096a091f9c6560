# flake8: noqa: F401
from contentdiff.transcripts.transcript_parser import parse_srt, parse_transcript
