# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

from typing import ClassVar, Protocol

import pytest

from typemeta import AccessMode, GetFieldInvoker, InvocationError, Invoker, MethodInvoker, SetFieldInvoker
from typemeta.fields import FieldInfo
from typemeta.members import describe_member


class Account:
    kind: ClassVar[str] = "basic"

    def __init__(self) -> None:
        self._balance = 0
        self.owner = "alice"

    def getBalance(self) -> int:
        return self._balance

    def setBalance(self, value: int) -> None:
        self._balance = value

    @classmethod
    def getKind(cls) -> str:
        return cls.kind

    def getBroken(self) -> int:
        msg = "boom"
        raise RuntimeError(msg)


class Premium(Account):
    def getBalance(self) -> int:
        return super().getBalance() * 2


def _method_invoker(name: str, value_type: type, mode: AccessMode) -> MethodInvoker:
    member = describe_member(Account, name, vars(Account)[name])
    assert member is not None
    return MethodInvoker(member, value_type, mode)


@pytest.mark.invoker
class TestMethodInvoker:
    def test_getter(self):
        invoker = _method_invoker("getBalance", int, AccessMode.GET)
        account = Account()

        assert isinstance(invoker, Invoker)
        assert invoker.invoke(account) == 0
        assert invoker.type is int
        assert invoker.owner is Account
        assert invoker.name == "getBalance"
        assert invoker.arity == 0
        assert str(invoker) == "MethodInvoker(Account.getBalance)"
        assert repr(invoker) == "<MethodInvoker(Account.getBalance): int>"

    def test_setter(self):
        setter = _method_invoker("setBalance", int, AccessMode.SET)
        account = Account()

        assert setter.arity == 1
        assert setter.invoke(account, 5) is None
        assert account.getBalance() == 5

    def test_dispatches_to_override(self):
        invoker = _method_invoker("getBalance", int, AccessMode.GET)
        premium = Premium()
        premium.setBalance(3)

        assert invoker.invoke(premium) == 6

    def test_wrong_argument_count(self):
        getter = _method_invoker("getBalance", int, AccessMode.GET)
        setter = _method_invoker("setBalance", int, AccessMode.SET)

        with pytest.raises(InvocationError, match="expects 0 argument"):
            getter.invoke(Account(), 1)
        with pytest.raises(InvocationError, match="expects 1 argument"):
            setter.invoke(Account())

    def test_wrong_target(self):
        invoker = _method_invoker("getBalance", int, AccessMode.GET)

        with pytest.raises(InvocationError, match="cannot be invoked on an instance of 'object'"):
            invoker.invoke(object())

    def test_instance_method_on_class(self):
        invoker = _method_invoker("getBalance", int, AccessMode.GET)

        with pytest.raises(InvocationError):
            invoker.invoke(Account)

    def test_class_method(self):
        invoker = _method_invoker("getKind", str, AccessMode.GET)

        assert invoker.class_level
        assert invoker.invoke(Account) == "basic"
        assert invoker.invoke(Premium()) == "basic"

    def test_failure_is_chained(self):
        invoker = _method_invoker("getBroken", int, AccessMode.GET)

        with pytest.raises(InvocationError, match="boom") as exc_info:
            invoker.invoke(Account())

        assert isinstance(exc_info.value.__cause__, RuntimeError)


@pytest.mark.invoker
class TestFieldInvoker:
    def test_instance_field(self):
        field = FieldInfo(name="owner", owner=Account, hint=str)
        getter = GetFieldInvoker(field, str)
        setter = SetFieldInvoker(field, str)
        account = Account()

        assert getter.arity == 0
        assert setter.arity == 1
        assert getter.invoke(account) == "alice"
        setter.invoke(account, "bob")
        assert getter.invoke(account) == "bob"
        assert account.owner == "bob"

    def test_class_level_field(self):
        class Counter:
            total: ClassVar[int] = 0

        field = FieldInfo(name="total", owner=Counter, hint=ClassVar[int], class_level=True)
        getter = GetFieldInvoker(field, int)
        setter = SetFieldInvoker(field, int)
        counter = Counter()

        setter.invoke(counter, 3)
        assert Counter.total == 3
        assert "total" not in vars(counter)
        assert getter.invoke(Counter) == 3
        assert getter.invoke(counter) == 3

    def test_missing_attribute(self):
        field = FieldInfo(name="missing", owner=Account, hint=int)

        with pytest.raises(InvocationError) as exc_info:
            GetFieldInvoker(field, int).invoke(Account())

        assert isinstance(exc_info.value.__cause__, AttributeError)

    def test_wrong_target(self):
        field = FieldInfo(name="owner", owner=Account, hint=str)

        with pytest.raises(InvocationError):
            GetFieldInvoker(field, str).invoke("not an account")

    def test_wrong_argument_count(self):
        field = FieldInfo(name="owner", owner=Account, hint=str)

        with pytest.raises(InvocationError):
            SetFieldInvoker(field, str).invoke(Account())
        with pytest.raises(InvocationError):
            GetFieldInvoker(field, str).invoke(Account(), "x")


class Ledger(Protocol):
    currency: ClassVar[str] = "EUR"

    def getTotal(self) -> int:
        return 42


class Book(Ledger):
    pass


@pytest.mark.invoker
class TestProtocolOwner:
    def test_method(self):
        member = describe_member(Ledger, "getTotal", vars(Ledger)["getTotal"])
        assert member is not None
        invoker = MethodInvoker(member, int, AccessMode.GET)

        assert invoker.invoke(Book()) == 42
        with pytest.raises(InvocationError, match="cannot be invoked on an instance of 'Account'"):
            invoker.invoke(Account())

    def test_class_level_field(self):
        field = FieldInfo(name="currency", owner=Ledger, hint=ClassVar[str], class_level=True)
        getter = GetFieldInvoker(field, str)

        assert getter.invoke(Book()) == "EUR"
        assert getter.invoke(Book) == "EUR"
        with pytest.raises(InvocationError):
            getter.invoke(Account)
