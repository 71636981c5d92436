class AssessmentError(Exception):
    """Base class for interview assessment failures."""


class EmptyInputError(AssessmentError):
    """Answer text was blank; the candidate should be re-prompted."""


class EmptyReportInputError(AssessmentError):
    """A report was requested over zero responses."""


class MissingKeywordsError(AssessmentError):
    """A question has no keywords, so its concept score is undefined."""


class InvalidQuestionBankError(AssessmentError):
    pass


class SubmissionInFlightError(AssessmentError):
    """Another answer for the same session is still being evaluated."""


class InterviewCompleteError(AssessmentError):
    pass


class InterviewIncompleteError(AssessmentError):
    pass


class IncompleteCandidateError(AssessmentError):
    pass


class InterviewNotStartedError(AssessmentError):
    pass
