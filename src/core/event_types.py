"""이벤트 유형 상수"""


class EventTypes:
    """이벤트 유형 문자열 상수"""

    # meaning
    MEANING_EVALUATED = "meaning_evaluated"

    # chronicle
    CHRONICLE_EMITTED = "chronicle_emitted"

    # engine
    TURN_PROCESSED = "turn_processed"
