"""
Invoke the upload handler in-process.

Usage:
  AWS_MOCK_FLAG=1 BUCKET_NAME=test-bucket python local_invoke.py "hello"
  LOCAL_FLAG=1 BUCKET_NAME=test-bucket python local_invoke.py "hello"

Without a textBody argument the event is empty, which exercises the
"[400] Empty text body." path.
"""
import json
import sys
import uuid
from types import SimpleNamespace

from upload_text.app import handler

event = {"textBody": sys.argv[1]} if len(sys.argv) > 1 else {}
context = SimpleNamespace(aws_request_id=f"local-{uuid.uuid4().hex[:8]}")

try:
    print(json.dumps(handler(event, context)))
except Exception as e:
    print(json.dumps({"errorType": type(e).__name__, "errorMessage": str(e)}))
    sys.exit(1)
