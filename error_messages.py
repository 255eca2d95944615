"""
에러 코드 -> 사용자용 한국어 메시지 매핑
"""

ERROR_MESSAGES = {
    # Validation errors
    'VALIDATION_ERROR': '입력 데이터가 올바르지 않습니다.',
    'INVALID_EMAIL': '유효하지 않은 이메일 주소입니다.',
    'INCOMPLETE_ANSWERS': '모든 질문에 답변해주세요.',
    'REQUIRED_FIELD': '필수 항목입니다.',

    # Authentication errors
    'TOKEN_EXPIRED': '인증 링크가 만료되었습니다. 다시 시도해주세요.',
    'TOKEN_INVALID': '유효하지 않은 인증 링크입니다.',
    'UNAUTHORIZED': '인증이 필요합니다.',
    'SESSION_EXPIRED': '세션이 만료되었습니다. 다시 로그인해주세요.',

    # Network errors
    'NETWORK_ERROR': '네트워크 연결을 확인해주세요.',
    'TIMEOUT_ERROR': '요청 시간이 초과되었습니다. 다시 시도해주세요.',

    # Server errors
    'DATABASE_ERROR': '서버 오류가 발생했습니다. 잠시 후 다시 시도해주세요.',
    'EMAIL_SEND_FAILED': '이메일 전송에 실패했습니다. 다시 시도해주세요.',
    'INTERNAL_ERROR': '서버 오류가 발생했습니다. 잠시 후 다시 시도해주세요.',
    'NOT_FOUND': '요청한 리소스를 찾을 수 없습니다.',

    # Test-specific errors
    'QUESTIONS_LOAD_FAILED': '질문을 불러오는데 실패했습니다. 다시 시도해주세요.',
    'TEST_SUBMIT_FAILED': '테스트 제출에 실패했습니다. 다시 시도해주세요.',
    'RESULT_LOAD_FAILED': '결과를 불러오는데 실패했습니다. 다시 시도해주세요.',

    'UNKNOWN_ERROR': '알 수 없는 오류가 발생했습니다.',
}


def get_error_message(code):
    return ERROR_MESSAGES.get(code) or ERROR_MESSAGES['UNKNOWN_ERROR']


def _field(error, name):
    if isinstance(error, dict):
        return error.get(name)
    return getattr(error, name, None)


def extract_error_message(error):
    """
    여러 형태의 에러(ApiError, dict, 예외, 문자열)를 화면에 표시할 문자열로 변환합니다.
    message 가 있으면 그대로, 없으면 code 로 테이블을 조회하고, 그 외에는 기본 메시지.
    """
    message = _field(error, 'message')
    if isinstance(message, str) and message:
        return message

    code = _field(error, 'code')
    if isinstance(code, str) and code:
        return get_error_message(code)

    if isinstance(error, str) and error:
        return error

    return ERROR_MESSAGES['UNKNOWN_ERROR']
