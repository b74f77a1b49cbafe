"""
SQLAlchemy Models for the back-office ledger
"""
from datetime import datetime
from decimal import Decimal
from sqlalchemy import (
    Column, Integer, String, Text, DateTime, Date, Numeric, ForeignKey, Index
)
from sqlalchemy.orm import relationship

from mktrading.core.database import Base


# ==================== AUTH ====================

class User(Base):
    """Login account"""
    __tablename__ = 'users'

    id = Column(Integer, primary_key=True)
    username = Column(String(100), unique=True, nullable=False)
    hashed_password = Column(String(255), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)


# ==================== PARTIES ====================

class Party(Base):
    """Customer or vendor the business deals with"""
    __tablename__ = 'parties'

    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False)
    contact = Column(String(100), nullable=True)
    address = Column(Text, nullable=True)
    gstin = Column(String(20), nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    challans = relationship("Challan", back_populates="party", passive_deletes=True)
    payments = relationship("Payment", back_populates="party", passive_deletes=True)

    __table_args__ = (
        Index('ix_parties_name', 'name'),
    )


class Challan(Base):
    """Delivery note recording goods sent against a party"""
    __tablename__ = 'challans'

    id = Column(Integer, primary_key=True)
    challan_number = Column(String(100), unique=True, nullable=False)
    party_id = Column(Integer, ForeignKey('parties.id', ondelete='SET NULL'), nullable=True)
    date = Column(Date, nullable=True)
    amount = Column(Numeric(15, 2), nullable=False, default=Decimal("0.00"))
    description = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    party = relationship("Party", back_populates="challans")

    __table_args__ = (
        Index('ix_challans_party_id', 'party_id'),
    )


# ==================== HR ====================

class Employee(Base):
    __tablename__ = 'employees'

    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False)
    contact = Column(String(100), nullable=True)
    role = Column(String(100), nullable=True)
    joining_date = Column(Date, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    salaries = relationship("Salary", back_populates="employee", passive_deletes=True)


class Salary(Base):
    """Salary paid to an employee for a month"""
    __tablename__ = 'salaries'

    id = Column(Integer, primary_key=True)
    employee_id = Column(Integer, ForeignKey('employees.id', ondelete='CASCADE'), nullable=False)
    month = Column(Integer, nullable=True)
    year = Column(Integer, nullable=True)
    amount = Column(Numeric(15, 2), nullable=False)
    paid_date = Column(Date, nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    employee = relationship("Employee", back_populates="salaries")

    __table_args__ = (
        Index('ix_salaries_employee_id', 'employee_id'),
    )


# ==================== EXPENSES ====================

class OfficeExpense(Base):
    __tablename__ = 'office_expenses'

    id = Column(Integer, primary_key=True)
    category = Column(String(100), nullable=True)
    description = Column(Text, nullable=True)
    amount = Column(Numeric(15, 2), nullable=False)
    date = Column(Date, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)


# ==================== PAYMENTS ====================

class Payment(Base):
    """Money received from a party"""
    __tablename__ = 'payments'

    id = Column(Integer, primary_key=True)
    party_id = Column(Integer, ForeignKey('parties.id', ondelete='SET NULL'), nullable=True)
    amount = Column(Numeric(15, 2), nullable=False)
    payment_date = Column(Date, nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    party = relationship("Party", back_populates="payments")

    __table_args__ = (
        Index('ix_payments_party_id', 'party_id'),
        Index('ix_payments_payment_date', 'payment_date'),
    )
