"""Domain Constants.

도메인 레이어의 상수 정의.
"""

# 뉴스 상태
STATUS_DRAFT = "draft"
STATUS_DELETED = "deleted"

# 생성 시 강제되는 상태 (생성과 동시에 발행 불가)
DEFAULT_STATUS = STATUS_DRAFT

# signed 64-bit 식별자 범위
ID_MIN = -(2**63)
ID_MAX = 2**63 - 1
