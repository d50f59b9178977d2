#!/usr/bin/env python3

from sqlalchemy import (
    Column,
    String,
    Integer,
    BigInteger,
)
from sqlalchemy.orm import declarative_base
from sqlalchemy.schema import Index


class Base:
    def dict(self):
        '''
        Returns a dict of the object
        Primarily for json serialization
        '''
        return {c.key: getattr(self, c.key) for c in self.__mapper__.column_attrs}


Base = declarative_base(cls=Base)


class Config (Base):
    '''
    Stores the configuration values for the application in key value pairs
    '''
    __tablename__ = 'configuration'

    name = Column(
        String(64),
        primary_key=True,
        doc="The setting's name")
    value = Column(
        'setting', String,
        doc="The setting's value")


class Prefix (Base):
    '''
    Stores the prefixes for servers
    '''
    __tablename__ = 'prefixes'

    server = Column(
        String(64),
        primary_key=True,
        doc='The server id for the prefix')
    prefix = Column(
        String(64),
        doc='The prefix for the server')


class Expression (Base):
    '''
    Named infix expressions saved by a user
    '''
    __tablename__ = 'expressions'

    id = Column(
        BigInteger().with_variant(Integer, 'sqlite'),
        primary_key=True,
        doc='An autonumber id')
    server = Column(
        String(64),
        nullable=False,
        doc='The server the expression was saved on')
    user = Column(
        String(64),
        nullable=False,
        doc='The id of the user who saved the expression')
    name = Column(
        String(64),
        nullable=False,
        doc='Expression name')
    expression = Column(
        String,
        nullable=False,
        doc='The infix expression, tokens separated by spaces')

    __table_args__ = (
        Index('_expression_index', server, user, name, unique=True),
    )

    def __str__(self):
        return '{0.name}: `{0.expression}`'.format(self)


if __name__ == '__main__':
    from operator import attrgetter

    for table in sorted(Base.metadata.tables.values(), key=attrgetter('name')):
        print(table.name)
        for column in table.columns:
            col = '{}: {}'.format(column.name, column.type)

            if column.primary_key:
                col += ' PK'

            if not column.nullable:
                col += ' NOT NULL'

            print('\t{}\n\t\t{}'.format(col, column.doc))
        print()
