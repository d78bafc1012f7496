from typing import NewType

UserId = NewType("UserId", int)
BookId = NewType("BookId", int)
LoanId = NewType("LoanId", int)
