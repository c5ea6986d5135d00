"""Service layer — classification queries returning ServiceResult."""
