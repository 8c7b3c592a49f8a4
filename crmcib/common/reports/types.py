from typing import NewType

ForceCode = NewType("ForceCode", str)
MessageCode = NewType("MessageCode", str)
SeverityLevel = NewType("SeverityLevel", str)
